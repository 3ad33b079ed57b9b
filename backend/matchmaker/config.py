import os

from dotenv import load_dotenv

load_dotenv()

# Team-strength gap at or above which the balancer tries a swap
BALANCE_GAP_THRESHOLD = float(os.getenv("MATCHGEN_BALANCE_GAP", "2"))

# Partnership grade gap at or above which a match counts as uncompetitive
PARTNERSHIP_GAP_THRESHOLD = int(os.getenv("MATCHGEN_PARTNERSHIP_GAP", "2"))

PLACEHOLDER_COURT = os.getenv("MATCHGEN_PLACEHOLDER_COURT", "TBD")

MAX_SET_NUMBER = int(os.getenv("MATCHGEN_MAX_SET_NUMBER", "6"))

MIN_PLAYERS_FOR_GENERATION = int(os.getenv("MATCHGEN_MIN_PLAYERS", "4"))
