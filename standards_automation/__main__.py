"""Allow running as: python -m standards_automation"""

from standards_automation.main import cli

if __name__ == "__main__":
    cli()
