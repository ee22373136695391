from lexbench.cli import main

raise SystemExit(main())
