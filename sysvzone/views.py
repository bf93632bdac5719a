"""
# Timezone views for adjusting instants in and out of local forms.

# Usage:

#!syntax/python
	from sysvzone import types, views
	z = views.Zone.open("EST5EDT,M3.2.0,M11.1.0")
	local, offset = z.localize(types.from_unix_timestamp(0))
"""
import os
import logging

from . import core
from . import types
from . import recipe
from . import rules
from . import gregorian

logger = logging.getLogger(__name__)

class Zone(object):
	"""
	# A standard offset and, optionally, a daylight saving offset that
	# alternate once per Gregorian year according to a pair of &rules.Change.

	# Zones are never modified after construction.

	# [ Properties ]
	# /descriptor/
		# The &recipe.Descriptor that the zone was built from.
	# /name/
		# The name of the zone; the recipe unless overridden.
	# /standard/
		# The &Offset of standard time.
	# /daylight/
		# The &Offset of daylight saving time; &None when the zone has no changes.
	"""

	class Offset(tuple):
		"""
		# Offsets are constructed by a tuple of the form: `(offset, abbreviation, type)`.
		# Primarily, the type signifies whether or not the offset is daylight
		# savings or not.
		"""
		__slots__ = ()

		@property
		def magnitude(self):
			"""
			# The offset in seconds east of UTC.
			"""
			return self[0]

		@property
		def abbreviation(self):
			"""
			# The Offset's timezone abbreviation; such as UTC, GMT, and EST.
			"""
			return self[1]

		@property
		def type(self):
			"""
			# Field used to identify if the &Offset is daylight savings time.
			"""
			return self[2]

		@property
		def is_dst(self):
			return self.type == 'dst'

		def __hash__(self):
			return self[0].__hash__()

		def __str__(self):
			return '%s%s%d' %(
				self.abbreviation,
				"+" if self.magnitude >= 0 else "-",
				abs(self.magnitude)
			)

		def __repr__(self):
			return '<%s(%s: %d)>' %(self.__class__.__name__, self.abbreviation, self.magnitude)

		def __eq__(self, ob):
			return tuple(self) == tuple(ob)

		def __int__(self):
			return self.magnitude

		def iso(self, instant):
			"""
			# Return the offset-qualified ISO representation of the given instant.
			"""
			return ' '.join((instant.select('iso'), str(self)))

	#: Number of years the transition search may step back before giving up.
	search_limit = 400

	# Facts shared by all recipe zones.
	is_floating = False
	is_utc = False
	is_olson = False
	category = None

	def __init__(self, descriptor, name=None):
		self.descriptor = descriptor
		self.name = name or descriptor.recipe

		self.standard = self.Offset((descriptor.std_offset, descriptor.std_abbreviation, 'std'))
		dst = descriptor.dst
		if dst is not None:
			self.daylight = self.Offset((dst.offset, dst.abbreviation, 'dst'))
		else:
			self.daylight = None

	def __repr__(self):
		return '<%s: %s>' %(self.__class__.__name__, self.name)

	@property
	def recipe(self):
		return self.descriptor.recipe

	@property
	def has_dst_changes(self):
		"""
		# Whether the zone alternates between standard and daylight saving time.
		"""
		return self.descriptor.dst is not None

	def latest(self, change, year, second_of_year, year_length=gregorian.year_length):
		"""
		# Identify the latest occurrence of &change at or before &second_of_year.

		# The returned value is in seconds relative to the start of &year and
		# will be negative when the occurrence was in a prior year.
		"""
		rule, at = change
		y = year + 1
		offset = year_length(year)

		for i in range(self.search_limit):
			occurrence = ((offset + rules.resolve(rule, y)) * 86400) + at
			if occurrence <= second_of_year:
				return occurrence
			y -= 1
			offset -= year_length(y)

		logger.error("transition search for %s exceeded %d years from %d",
			rule, self.search_limit, year)
		raise core.InternalError("no occurrence of %s found within %d years of %d" %(
			rule, self.search_limit, year
		))

	def is_dst(self, instant):
		"""
		# Whether daylight saving time is in effect at the given UTC &instant.

		# [ Parameters ]
		# /instant/
			# The &types.Instant in Universal Time.
		"""
		dst = self.descriptor.dst
		if dst is None:
			return False

		day, second = types.Instant(instant).clamp()
		year, doy = gregorian.year_and_day(day)
		soy = (doy * 86400) + second

		end = self.latest(dst.end, year, soy)
		start = self.latest(dst.start, year, soy)
		return start > end

	def find(self, instant):
		"""
		# Get the &Offset in effect at the given UTC &instant.
		"""
		if self.is_dst(instant):
			return self.daylight
		return self.standard

	def offset(self, instant):
		"""
		# The offset, in seconds east of UTC, in effect at &instant.
		"""
		return self.find(instant)[0]

	def abbreviation(self, instant):
		"""
		# The abbreviation of the offset in effect at &instant.
		"""
		return self.find(instant)[1]

	def is_dst_for_local(self, local):
		"""
		# Whether daylight saving time is in effect at the local clock reading, &local.

		# When the reading is ambiguous, the numerically lower offset is selected.
		# Raises &core.NonExistentLocalTime when the reading was skipped by a
		# change to daylight saving time.

		# [ Parameters ]
		# /local/
			# The &types.Instant holding the local clock reading.
		"""
		dst = self.descriptor.dst
		if dst is None:
			return False

		local = types.Instant(local).clamp()
		std_offset = self.descriptor.std_offset

		std_valid = not self.is_dst(local.rollback(std_offset))
		dst_valid = self.is_dst(local.rollback(dst.offset))

		if std_valid and dst_valid:
			return std_offset > dst.offset
		elif std_valid:
			return False
		elif dst_valid:
			return True

		raise core.NonExistentLocalTime(local, self.name)

	def offset_for_local(self, local):
		"""
		# The offset, in seconds east of UTC, in effect at the local clock reading, &local.
		"""
		return self.normalize(local)[1][0]

	def localize(self, instant):
		"""
		# Given a UTC &instant, return the local clock reading and the &Offset used.
		"""
		offset = self.find(instant)
		return (types.Instant(instant).elapse(offset[0]), offset)

	def normalize(self, local):
		"""
		# Given a local clock reading, return the UTC instant and the &Offset used.
		"""
		if self.is_dst_for_local(local):
			offset = self.daylight
		else:
			offset = self.standard
		return (types.Instant(local).clamp().rollback(offset[0]), offset)

	def transitions(self, year):
		"""
		# Get the changes whose rule selects a day in &year.

		# Returns a chronologically ordered list of pairs consisting of the UTC
		# &types.Instant of the change and the &Offset in effect after it.
		"""
		dst = self.descriptor.dst
		if dst is None:
			return []

		r = [
			(types.Instant.normal(dst.start.day(year), dst.start.second), self.daylight),
			(types.Instant.normal(dst.end.day(year), dst.end.second), self.standard),
		]
		r.sort(key=lambda x: x[0])
		return r

	@classmethod
	def from_recipe(Class, string, name=None):
		d = recipe.parse(string)
		logger.debug("constructed zone %r from %r", name or string, string)
		return Class(d, name=name)

	@classmethod
	def open(Class, string=None, name=None, environ=os.environ):
		"""
		# Construct a zone from &string, or from the `TZ` environment variable
		# when &string is not given. `UTC0` is used when neither is available.
		"""
		if not string:
			string = environ.get(recipe.tzenviron)

		if not string:
			string = recipe.tzdefault

		return Class.from_recipe(string, name=name)
