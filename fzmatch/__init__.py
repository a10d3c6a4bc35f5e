from fzmatch.matcher import Match, match, match_score
from fzmatch.ranker import Ranked, rank
