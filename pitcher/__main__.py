from pitcher.cli import main

raise SystemExit(main())
