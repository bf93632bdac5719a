"""
# Primary public module.

# Provides access to recipe parsing and &.views.Zone construction along with
# the instant constructors of &.types.

#!/pl/python
	tz = libzone.zone('EST5EDT,M3.2.0,M11.1.0')
	now = libzone.from_unix_timestamp(1593561600)
	assert tz.abbreviation(now) == 'EDT'
"""
import os
import functools

from . import recipe
from . import views
from .core import *
from .types import Instant, from_unix_timestamp, from_datetime, local_from_datetime

__shortname__ = 'libzone'

Zone = views.Zone
parse = recipe.parse

def zone(string:str=None, name:str=None,
		zone_open=functools.lru_cache()(views.Zone.open),
	) -> views.Zone:
	"""
	# Return a Zone object for the recipe &string or the `TZ` environment variable.

	# [ Parameters ]
	# /string/
		# The System V timezone recipe. When &None, `TZ` is consulted.
	# /name/
		# Optional name overriding the recipe as the zone's &views.Zone.name.

	# `TZ` is read here rather than by &views.Zone.open so that the cache is keyed
	# by the recipe in effect; a cached &None would outlive changes to the environment.
	"""
	if not string:
		string = os.environ.get(recipe.tzenviron) or recipe.tzdefault

	return zone_open(string, name)

def name(zone:views.Zone) -> str:
	return zone.name

def has_dst_changes(zone:views.Zone) -> bool:
	return zone.has_dst_changes

def is_dst_for_instant(zone:views.Zone, day:int, second:int) -> bool:
	return zone.is_dst(Instant((day, second)))

def offset_for_instant(zone:views.Zone, day:int, second:int) -> int:
	return zone.offset(Instant((day, second)))

def abbreviation_for_instant(zone:views.Zone, day:int, second:int) -> str:
	return zone.abbreviation(Instant((day, second)))

def offset_for_local(zone:views.Zone, day:int, second:int) -> int:
	"""
	# The offset in effect at the local clock reading `(day, second)`.
	# Raises &NonExistentLocalTime for readings skipped by a change.
	"""
	return zone.offset_for_local(Instant((day, second)))
