from tangible_create.cli import main

raise SystemExit(main())
