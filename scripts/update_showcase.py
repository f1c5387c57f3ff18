#!/usr/bin/env python3
"""
Update the showcase section of README.md with the owner's repositories
tagged with a topic, fetched from the GitHub API.

Markers used in README.md:
  <!-- SHOWCASE-START --> ... <!-- SHOWCASE-END -->

Inputs are read from INPUT_* environment variables as set by the Actions
runner, for example:
  INPUT_TOKEN: token used for the GitHub API and the commit
  INPUT_USERNAME: account whose repositories are listed
  INPUT_TOPIC: topic a repository must carry (default: showcase)
  INPUT_FORMAT: list, table, or card (default: card)
"""

import sys

from showcase_updater.controller import main

if __name__ == "__main__":
    sys.exit(main())
