"""Entry point for python -m balance_gateway."""

from balance_gateway.main import main

if __name__ == "__main__":
    main()
