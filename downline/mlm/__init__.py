# downline/mlm/__init__.py

from .records import member_record
from .tree import build_children_index, collect_descendant_ids, index_roster
from .stats_engine import aggregate_network_stats, empty_stats
