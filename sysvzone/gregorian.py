"""
# Proleptic Gregorian calendar functions and data.

# Days are counted from the first day of year zero, `(0, 1, 1)`, which is day `0`.
# Days before the datum are negative. Months and days of the month are one-based,
# and the day of the year is the ordinal day: January 1st is `1`.
"""
import itertools

#: number of years in a gregorian cycle.
years_in_cycle = 400

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

#: number of months in a year.
months_in_year = len(calendar_year)

# Days preceding each month; the final entry is the length of the year.
_year_accumulation = tuple(itertools.accumulate(itertools.chain((0,), calendar_year)))
_leap_accumulation = tuple(itertools.accumulate(itertools.chain((0,), calendar_leap)))

def _leaps_before(year_of_cycle):
	# Year zero of a cycle is always leap.
	y = year_of_cycle
	return (y + 3) // 4 - (y + 99) // 100 + (y + 399) // 400

def _days_before(year_of_cycle):
	return (year_of_cycle * 365) + _leaps_before(year_of_cycle)

#: Number of days in a Gregorian cycle.
days_in_cycle = _days_before(years_in_cycle)

def year_is_leap(y):
	"""
	# Given a gregorian calendar year, determine whether it is a leap year.
	"""
	if y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0):
		return True
	return False

def year_length(year):
	"""
	# The number of days in &year; `365` or `366`.
	"""
	return 366 if year_is_leap(year) else 365

def month_days(year, month):
	"""
	# The number of days in the &month of &year.
	"""
	if year_is_leap(year):
		return calendar_leap[month-1]
	return calendar_year[month-1]

def days_from_date(date, divmod=divmod):
	"""
	# Convert a Gregorian date in the common form, (year, month, day), to the number
	# of days leading up to the date.

	# Days that overflow the month are not validated and are carried into the
	# following days.
	"""
	year, month, day = date
	cycles, year_of_cycle = divmod(year, years_in_cycle)

	if year_is_leap(year):
		months = _leap_accumulation
	else:
		months = _year_accumulation

	return (cycles * days_in_cycle) + _days_before(year_of_cycle) + months[month-1] + (day - 1)

def date_from_days(days, divmod=divmod):
	"""
	# Convert the given Earth-days into a Gregorian date in the common form:
	# (year, month, day).
	"""
	cycles, day_of_cycle = divmod(days, days_in_cycle)

	# 366 day years underestimate the year by at most one.
	year_of_cycle = day_of_cycle // 366
	while _days_before(year_of_cycle + 1) <= day_of_cycle:
		year_of_cycle += 1

	year = (cycles * years_in_cycle) + year_of_cycle
	day_of_year = day_of_cycle - _days_before(year_of_cycle)

	if year_is_leap(year):
		months = _leap_accumulation
	else:
		months = _year_accumulation

	month = 1
	while months[month] <= day_of_year:
		month += 1

	return (year, month, day_of_year - months[month-1] + 1)

def day_of_year(date):
	"""
	# The ordinal day of the year of the given (year, month, day).
	"""
	year = date[0]
	return days_from_date(date) - days_from_date((year, 1, 1)) + 1

def year_and_day(days):
	"""
	# Split a day number into the year and the ordinal day of that year.
	"""
	year = date_from_days(days)[0]
	return (year, days - days_from_date((year, 1, 1)) + 1)

def weekday_from_days(days):
	"""
	# The day of the week of the given day number; `0` is Sunday and `6` is Saturday.

	# The datum, `(0, 1, 1)`, was a Saturday.
	"""
	return (days + 6) % 7

def weekday(date):
	"""
	# The day of the week of the given (year, month, day); `0` is Sunday.
	"""
	return weekday_from_days(days_from_date(date))
