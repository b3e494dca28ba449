from identicon.cli import main

raise SystemExit(main())
