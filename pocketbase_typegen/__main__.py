import sys
from pocketbase_typegen.cli import main

sys.exit(main())
