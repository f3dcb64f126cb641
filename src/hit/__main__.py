from hit.cli import main

raise SystemExit(main())
