import sys

from commitgen.cli.main import main

sys.exit(main())
