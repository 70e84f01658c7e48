from camarim.shell.menu import main

raise SystemExit(main())
