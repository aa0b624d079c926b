def analysis_header_message(channel_a: str, channel_b: str) -> str:
    return f'''📊 slackVenn: Analyzing channel membership overlap...
🔍 Channel A: {channel_a}
🔍 Channel B: {channel_b}
'''


def _user_list(user_ids: list[str], usernames: dict[str, str]) -> str:
    return ''.join(f'\n - {usernames.get(u, "unknown")}' for u in user_ids)


def analysis_results_message(
    members_a: list[str],
    members_b: list[str],
    common: list[str],
    only_a: list[str],
    only_b: list[str],
    usernames: dict[str, str],
) -> str:

    message = f'''📈 Analysis Results:
   Channel A: {len(members_a)} members
   Channel B: {len(members_b)} members
   Overlap: {len(common)} members
'''

    message += '\n🟢 Users in BOTH channels:' + _user_list(common, usernames)
    message += '\n\n🔵 Users ONLY in Channel A:' + _user_list(only_a, usernames)
    message += '\n\n🟣 Users ONLY in Channel B:' + _user_list(only_b, usernames)

    return message
