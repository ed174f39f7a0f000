"""Hit the statistics endpoints of a running deployment one after another."""
import os
import sys
import time

import requests

BASE_URL = os.getenv("FOOTBALL_API_URL", "http://localhost:5001")


def build_urls(base_url, league_id, team_a, team_b):
    return [
        f"{base_url}/api/leagues/{league_id}/table",
        f"{base_url}/api/leagues/{league_id}/top-scorers",
        f"{base_url}/api/leagues/{league_id}/top-assists",
        f"{base_url}/api/head-to-head?teamA={team_a}&teamB={team_b}",
    ]


def run(urls, delay=2):
    """Request each URL in order; stop at the first failure. Returns True if all succeeded."""
    for idx, url in enumerate(urls):
        try:
            print(f"Starting request {idx + 1}: {url}")
            response = requests.get(url, timeout=30)

            if response.status_code == 200:
                print(f"Success: {url} -> {response.status_code}")
            else:
                print(f"Failed: {url} -> Status code: {response.status_code}")
                return False

        except requests.RequestException as e:
            print(f"Error: {url} -> {e}")
            return False
        if delay:
            time.sleep(delay)  # keep requests sequential on small hosts
    return True


if __name__ == "__main__":
    # usage: python call_my_api.py <league_id> <teamA> <teamB>
    league_id = sys.argv[1] if len(sys.argv) > 1 else "1"
    team_a = sys.argv[2] if len(sys.argv) > 2 else "1"
    team_b = sys.argv[3] if len(sys.argv) > 3 else "2"
    ok = run(build_urls(BASE_URL, league_id, team_a, team_b))
    sys.exit(0 if ok else 1)
