from tagbox.cli import main

raise SystemExit(main())
