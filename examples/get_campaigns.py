#!/usr/bin/env python3
"""
List all campaigns of the configured client customer.

Uses the get_all_entries extension, which pages through CampaignService.get.

Usage:
    python examples/get_campaigns.py [--page-size 100]
"""

import argparse
import sys

from adsapi import AdsApi, ApiException, HttpError, OAuth2VerificationRequired
from adsapi.core.config import get_config
from adsapi.core.logging_config import setup_logging
from adsapi.extensions import PAGE_SIZE

API_VERSION = "v201609"


def get_campaigns(page_size: int) -> None:
    adwords = AdsApi()
    campaign_srv = adwords.service("CampaignService", API_VERSION)

    selector = {
        "fields": ["Id", "Name", "Status"],
        "ordering": [{"field": "Name", "sort_order": "ASCENDING"}],
    }

    campaigns = campaign_srv.get_all_entries(selector, page_size)
    for campaign in campaigns:
        print(f"Campaign ID {campaign['id']}, name '{campaign['name']}' and status '{campaign['status']}' was found.")
    print(f"\tTotal number of campaigns found: {len(campaigns)}")


def main() -> int:
    parser = argparse.ArgumentParser(description="List AdWords campaigns")
    parser.add_argument("--page-size", type=int, default=PAGE_SIZE, help="Entries requested per page")
    args = parser.parse_args()

    library_config = get_config().library
    setup_logging(library_config.log_level, library_config.json_logging)

    try:
        get_campaigns(args.page_size)
    except OAuth2VerificationRequired:
        print("Authorization credentials are not valid. Check the oauth2 section of adsapi.json.")
        return 1
    except HttpError as e:
        print(f"HTTP Error: {e}")
        return 1
    except ApiException as e:
        print(f"Message: {e}")
        for index, error in enumerate(e.errors, start=1):
            print(f"\tError [{index}]: {error}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
