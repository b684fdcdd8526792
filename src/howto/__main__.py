from howto.cli import main

raise SystemExit(main())
