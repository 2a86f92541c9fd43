"""
Command-line runner: reveal the phone number for a single page URL
Usage: python main.py <pageUrl>
"""
import logging
import sys

from config import get_config
from phone_scraper import PhoneScraper, PhoneNumberNotFound


def main(argv=None):
    """Main execution function"""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("Usage: python main.py <pageUrl>")
        return 1

    page_url = argv[0]
    logging.basicConfig(level=get_config()["logging"]["level"])

    scraper = PhoneScraper()
    try:
        print(f"Looking up phone number: {page_url}")
        phone = scraper.get_phone_number(page_url)
        print(f"Phone: {phone}")
        return 0

    except PhoneNumberNotFound:
        print("Phone number not found")
        return 1
    except KeyboardInterrupt:
        print("\n\nLookup interrupted by user")
        return 1
    except Exception as e:
        print(f"\nError: {str(e)}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
