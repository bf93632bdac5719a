"""
# Day rules and change rules of System V timezone recipes.

# Day rules select a day of a given Gregorian year. They are kept unresolved
# in the parsed recipe as the selected day depends on the year being examined.

# [ Elements ]

# /Julian/
	# `Jn`; the `n`th day of a common year. February 29th is never counted, so
	# `J59` is always February 28th and `J60` is always March 1st.
# /Plain/
	# `n`; the zero-based day of the year. February 29th is counted.
# /MonthWeekDay/
	# `Mm.w.d`; the `d` weekday of the `w`th week of month `m`.
	# Week `5` refers to the last seven days of the month.
# /Change/
	# A day rule paired with the second, relative to midnight UTC, that the change occurs.
"""
import collections
from . import gregorian

class Variant(object):
	"""
	# Equality for day rules that distinguishes the form; `J60` is not `60`.
	"""
	__slots__ = ()

	def __eq__(self, ob):
		return self.__class__ is ob.__class__ and tuple.__eq__(self, ob)

	def __ne__(self, ob):
		return not self.__eq__(ob)

	def __hash__(self):
		return hash((self.__class__.__name__,) + tuple(self))

class Julian(Variant, collections.namedtuple('Julian', ('day',))):
	__slots__ = ()

	def resolve(self, year):
		if self.day < 60:
			return self.day
		return gregorian.year_length(year) - 365 + self.day

	def date(self, year):
		return _date_of_ordinal(year, self.resolve(year))

	def __str__(self):
		return 'J%d' %(self.day,)

class Plain(Variant, collections.namedtuple('Plain', ('day',))):
	__slots__ = ()

	def resolve(self, year):
		return self.day + 1

	def date(self, year):
		return _date_of_ordinal(year, self.resolve(year))

	def __str__(self):
		return '%d' %(self.day,)

class MonthWeekDay(Variant, collections.namedtuple('MonthWeekDay', ('month', 'week', 'weekday'))):
	__slots__ = ()

	def date(self, year):
		"""
		# The (year, month, day) selected by the rule in &year.
		"""
		if self.week == 5:
			first = gregorian.month_days(year, self.month) - 6
		else:
			first = ((self.week - 1) * 7) + 1

		wd = gregorian.weekday((year, self.month, first))
		return (year, self.month, first + ((self.weekday - wd) % 7))

	def resolve(self, year):
		return gregorian.day_of_year(self.date(year))

	def __str__(self):
		return 'M%d.%d.%d' %self

def _date_of_ordinal(year, ordinal):
	# Ordinals past the end of the year land in the following one.
	return gregorian.date_from_days(gregorian.days_from_date((year, 1, 1)) + ordinal - 1)

class Change(collections.namedtuple('Change', ('rule', 'second'))):
	"""
	# A transition rule. &second is the clock time of the change converted to
	# Universal Time using the offset in effect before the change; it may be
	# negative or exceed a day.
	"""
	__slots__ = ()

	def day(self, year):
		"""
		# The day number of the change's day in &year.
		"""
		return gregorian.days_from_date((year, 1, 1)) + resolve(self.rule, year) - 1

def resolve(rule, year):
	"""
	# Identify the ordinal day of &year selected by &rule.

	# Day `1` is January 1st. Rules may select the day after December 31st,
	# `Plain(365)` in a common year.
	"""
	return rule.resolve(year)

#: Rules applied when a recipe with daylight saving time has none.
#: The last Sundays of April and October.
default_start = MonthWeekDay(4, 5, 0)
default_end = MonthWeekDay(10, 5, 0)
