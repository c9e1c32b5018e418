from ra_sampling.cli import main

raise SystemExit(main())
