from roadnoise.cli import main

raise SystemExit(main())
