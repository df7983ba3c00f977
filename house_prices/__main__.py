import sys

from house_prices.run import main

sys.exit(main())
