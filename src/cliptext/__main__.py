import sys

from cliptext.main import main

sys.exit(main())
