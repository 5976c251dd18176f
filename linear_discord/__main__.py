import sys

from linear_discord.main import main

sys.exit(main())
