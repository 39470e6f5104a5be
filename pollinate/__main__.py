from pollinate.cli import main


raise SystemExit(main())
