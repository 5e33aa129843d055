# File Chain (see DEVELOPER.md):
# Doc Version: v1.0.0
#
# - Called by: Python interpreter when running `python -m paralog`
# - Reads from: None (entry point only)
# - Writes to: None (calls main() and exits with its return code)
# - Calls into: src/paralog/main.main()
"""Allow running the package with python -m paralog (same as the paralog console script)."""
from paralog.main import main
import sys
sys.exit(main())
