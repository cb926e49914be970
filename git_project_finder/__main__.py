import sys

from git_project_finder.cli.main import main

sys.exit(main())
