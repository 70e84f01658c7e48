"""
Camarim Core Primitives — Records and Ledgers
===============================================
Pure Python building blocks consumed by the managers:

    ledger   — item → quantity lines (stock, dressing room, order, shopping list)
    catalog  — purchasable items and their prices
    people   — Person / Performer identity records
    display  — text rendering capability shared by every record
"""
