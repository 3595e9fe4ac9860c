from summoning.main import main

raise SystemExit(main())
