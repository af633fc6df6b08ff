import sys

from keyscript.cmdline import main

sys.exit(main())
