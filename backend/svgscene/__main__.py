import sys

from svgscene.convert import main

sys.exit(main())
