#!/usr/bin/env python3
import argparse
import logging

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from venn_utils.config import get_slack_token
from venn_utils.messages import analysis_header_message, analysis_results_message
from venn_utils.sets import difference, intersection
from venn_utils.slack_helpers import get_channel_members, user_id_to_name


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='slack-venn',
        description='slackVenn - Slack channel membership analyzer. '
                    'Shows the user overlap between two channels.',
    )
    parser.add_argument('channel_a', help='First channel ID, e.g. C1234567890.')
    parser.add_argument('channel_b', help='Second channel ID.')
    parser.add_argument('--limit', type=int, default=1000, help='Members requested per page (default: 1000).')
    parser.add_argument('--verbose', action='store_true', help='Log every API page.')
    return parser.parse_args(argv)


def _fetch_members(client: WebClient, channel: str, label: str, limit: int) -> list[str]:
    try:
        return get_channel_members(client, channel, limit=limit)
    except SlackApiError as e:
        raise SystemExit(f"Error getting members of channel {label}: {e.response['error']}")
    except OSError as e:
        raise SystemExit(f"Error getting members of channel {label}: {e}")


def main(argv=None) -> int:
    args = _parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        token = get_slack_token()
    except ValueError:
        raise SystemExit('SLACK_TOKEN env var is required')

    # No retry handlers: a failed call fails the run.
    client = WebClient(token=token, retry_handlers=[])

    print(analysis_header_message(args.channel_a, args.channel_b))

    members_a = _fetch_members(client, args.channel_a, 'A', args.limit)
    members_b = _fetch_members(client, args.channel_b, 'B', args.limit)

    usernames = user_id_to_name(client, members_a + members_b)

    only_a = difference(members_a, members_b)
    only_b = difference(members_b, members_a)
    common = intersection(members_a, members_b)

    print(analysis_results_message(members_a, members_b, common, only_a, only_b, usernames))

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
