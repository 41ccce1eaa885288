#!/usr/bin/env python3
"""
Pause a campaign through CampaignService.mutate.

Configuration is read from ~/adsapi.json (or the file named by
ADSAPI_CONFIG_FILE) and ADSAPI_* environment variables. To get campaign IDs,
run get_campaigns.py.

Usage:
    python examples/pause_campaign.py --campaign-id 12345
"""

import argparse
import sys

from adsapi import AdsApi, ApiException, HttpError, OAuth2VerificationRequired
from adsapi.core.config import get_config
from adsapi.core.logging_config import setup_logging

API_VERSION = "v201609"


def pause_campaign(campaign_id: int) -> None:
    adwords = AdsApi()

    # Set library.log_level to DEBUG in the configuration file to log SOAP envelopes
    campaign_srv = adwords.service("CampaignService", API_VERSION)

    operation = {
        "operator": "SET",
        "operand": {"id": campaign_id, "status": "PAUSED"},
    }

    response = campaign_srv.mutate([operation])
    if response and response.get("value"):
        campaign = response["value"][0]
        print(f"Campaign ID {campaign['id']} was successfully updated, status set to '{campaign.get('status')}'.")
    else:
        print("No campaigns were updated.")


def main() -> int:
    parser = argparse.ArgumentParser(description="Pause an AdWords campaign")
    parser.add_argument("--campaign-id", type=int, required=True, help="ID of the campaign to pause")
    args = parser.parse_args()

    library_config = get_config().library
    setup_logging(library_config.log_level, library_config.json_logging)

    try:
        pause_campaign(args.campaign_id)
    except OAuth2VerificationRequired:
        print(
            "Authorization credentials are not valid. Set the oauth2 client_id, client_secret and "
            "refresh_token (or a service account key) in adsapi.json."
        )
        return 1
    except HttpError as e:
        print(f"HTTP Error: {e}")
        return 1
    except ApiException as e:
        print(f"Message: {e}")
        print("Errors:")
        for index, error in enumerate(e.errors, start=1):
            print(f"\tError [{index}]:")
            for field, value in error.items():
                print(f"\t\t{field}: {value}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
