"""
Sample services — modular organization of sample status operations.

Re-exports public classes so existing code keeps working:
    from sampleman.services import SampleQueries, SortOption
"""

from sampleman.services.listing import SampleOrder, SampleOrderItem, SortOption
from sampleman.services.queries import SampleQueries

__all__ = [
    'SampleQueries',
    'SampleOrder',
    'SampleOrderItem',
    'SortOption',
]
