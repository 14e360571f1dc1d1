import sys

from mysql_userstat.runner import main

sys.exit(main())
