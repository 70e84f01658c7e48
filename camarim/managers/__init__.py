"""
Camarim Managers — Public API
===============================
"""

from camarim.managers.base import SequentialRegistry
from camarim.managers.dressing_rooms import DressingRoom, DressingRoomManager
from camarim.managers.orders import Order, OrderManager
from camarim.managers.performers import PerformerManager
from camarim.managers.shopping_lists import ShoppingList, ShoppingListManager

__all__ = [
    "SequentialRegistry",
    "DressingRoom",
    "DressingRoomManager",
    "Order",
    "OrderManager",
    "PerformerManager",
    "ShoppingList",
    "ShoppingListManager",
]
