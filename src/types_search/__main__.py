from types_search.cli import main


raise SystemExit(main())
