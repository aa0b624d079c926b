import logging
from typing import Iterable

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from venn_utils.models import User


UNKNOWN_USER = 'unknown'


def get_channel_members(client: WebClient, channel: str, limit: int = 1000) -> list[str]:
    members = []
    cursor = ''
    while True:
        try:
            response = client.conversations_members(channel=channel, cursor=cursor, limit=limit)

        except SlackApiError as e:
            logging.error(f"Error fetching members of {channel}: {e.response['error']}")
            raise

        except OSError as e:
            logging.error(f"Error fetching members of {channel}: {e}")
            raise

        members.extend(response.get('members', []))
        cursor = response.get('response_metadata', {}).get('next_cursor', '')
        logging.debug(f'{channel}: {len(members)} members so far, next cursor {cursor!r}')
        if not cursor:
            break

    return members


def get_user_info(client: WebClient, user: str) -> dict:
    response = client.users_info(user=user)
    return response.get('user', {})


def user_id_to_name(client: WebClient, ids: Iterable[str]) -> dict[str, str]:
    names = {}
    for user_id in ids:
        if user_id in names:
            continue
        try:
            names[user_id] = User(get_user_info(client, user_id)).name or UNKNOWN_USER

        except SlackApiError as e:
            logging.warning(f"Error fetching member {user_id}: {e.response['error']}")
            names[user_id] = UNKNOWN_USER

        # URLError and socket timeouts from the transport.
        except OSError as e:
            logging.warning(f"Error fetching member {user_id}: {e}")
            names[user_id] = UNKNOWN_USER

    return names
