from storefront.demo import main

raise SystemExit(main())
