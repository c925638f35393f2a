from artpipe.pipeline import main

raise SystemExit(main())
