from greek_betacode.cli import main

raise SystemExit(main())
