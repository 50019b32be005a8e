from eco_grid.cli import main

raise SystemExit(main())
