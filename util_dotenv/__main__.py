from util_dotenv.main import main

raise SystemExit(main())
