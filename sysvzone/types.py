"""
# Civil instants; the day number and second of the day pairs that zones operate on.

# &Instant is the only time type that &.views.Zone consumes. Whether an instant
# refers to Universal Time or to a local clock reading is decided by the method
# it is given to.

#!python
	y2k = types.Instant.of((2000, 1, 1))
	noon = y2k.elapse(12 * 3600)
	assert noon.select('iso') == '2000-01-01T12:00:00'

# [ Elements ]

# /unix_epoch/
	# The day number of 1970-01-01.
# /day_seconds/
	# The number of seconds in an Earth-day; leap seconds are not represented.
"""
import operator
from . import gregorian

day_seconds = 86400
last_second = day_seconds - 1
unix_epoch = gregorian.days_from_date((1970, 1, 1))

class Instant(tuple):
	"""
	# A `(day, second)` pair identifying a second on the proleptic Gregorian calendar.

	# [ Properties ]
	# /day/
		# The day number as defined by &.gregorian.
	# /second/
		# The second of the day; usually in `0..86399`. `86400` is tolerated as
		# a leap second representation and clamped by &clamp.
	"""
	__slots__ = ()

	day = property(operator.itemgetter(0))
	second = property(operator.itemgetter(1))

	def __repr__(self):
		return '<%s(%s)>' %(self.__class__.__name__, self.select('iso'))

	@classmethod
	def normal(Class, day, second, divmod=divmod):
		"""
		# Construct an instant carrying excess or negative seconds into &day.
		"""
		days, second = divmod(second, day_seconds)
		return Class((day + days, second))

	@classmethod
	def of(Class, date, timeofday=(0, 0, 0)):
		"""
		# Construct an instant from a `(year, month, day)` date and an
		# `(hour, minute, second)` time of day.
		"""
		hour, minute, second = timeofday
		return Class.normal(
			gregorian.days_from_date(date),
			(hour * 3600) + (minute * 60) + second
		)

	def clamp(self):
		"""
		# Return an instant whose second is no greater than `86399`.
		"""
		if self[1] > last_second:
			return self.__class__((self[0], last_second))
		return self

	def elapse(self, seconds):
		"""
		# Return the instant &seconds after this one.
		"""
		return self.normal(self[0], self[1] + seconds)

	def rollback(self, seconds):
		"""
		# Return the instant &seconds before this one.
		"""
		return self.normal(self[0], self[1] - seconds)

	def select(self, field):
		"""
		# Retrieve a calendar representation of the instant.

		# [ Parameters ]
		# /field/
			# One of `'date'`, `'timeofday'`, or `'iso'`.
		"""
		if field == 'date':
			return gregorian.date_from_days(self[0])
		elif field == 'timeofday':
			minutes, second = divmod(self[1], 60)
			hour, minute = divmod(minutes, 60)
			return (hour, minute, second)
		elif field == 'iso':
			return "%04d-%02d-%02dT%02d:%02d:%02d" %(
				self.select('date') + self.select('timeofday')
			)
		raise KeyError(field)

def from_unix_timestamp(unix_timestamp):
	"""
	# Create an &Instant from the number of seconds since 1970-01-01 UTC.
	"""
	return Instant.normal(unix_epoch, int(unix_timestamp // 1))

def local_from_datetime(dt):
	"""
	# Create an &Instant from the wall clock reading of a &datetime.datetime,
	# ignoring any `tzinfo`. Sub-second precision is discarded.
	"""
	return Instant.of((dt.year, dt.month, dt.day), (dt.hour, dt.minute, dt.second))

def from_datetime(dt):
	"""
	# Create an &Instant referring to Universal Time from a &datetime.datetime.

	# Aware datetimes are shifted by their `utcoffset()`; naive datetimes are
	# presumed to already be in UTC.
	"""
	i = local_from_datetime(dt)
	offset = dt.utcoffset()
	if offset is not None:
		i = i.rollback(int(offset.total_seconds()))
	return i
