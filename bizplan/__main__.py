"""Allow running as: python -m bizplan"""

from bizplan.main import main

if __name__ == "__main__":
    raise SystemExit(main())
