"""
[ About ]
---------

sysvzone implements timezones specified by System V timezone recipes and the
POSIX extended form of the same syntax; the strings found in the `TZ`
environment variable. A recipe expresses either a fixed offset from Universal
Time or a pair of offsets, standard and daylight saving, that alternate once
per Gregorian year according to a pair of change rules.

&.library will be referred to as `libzone` throughout the examples in this documentation.

#!/pl/python
	from sysvzone import library as libzone

[ Recipes ]
-----------

A fixed offset is an abbreviation followed by the offset:

#!/pl/python
	tz = libzone.zone('EST5')
	assert tz.has_dst_changes == False

The sign of the offset is the opposite of the actual offset; `EST5` is five
hours *behind* Universal Time.

#!/pl/python
	assert tz.standard.magnitude == -18000

Daylight saving time is specified with a second abbreviation, an optional
offset, and two change rules:

#!/pl/python
	tz = libzone.zone('EST5EDT,M3.2.0,M11.1.0')

Abbreviations containing digits or signs must be enclosed in angle brackets:

#!/pl/python
	iran = libzone.zone('<+0330>-3:30<+0430>,J79/0,J263/0')

[ Instants ]
------------

Zones operate on &.types.Instant pairs; a day number and the second of the day.

#!/pl/python
	summer = libzone.Instant.of((2020, 7, 1))
	assert tz.abbreviation(summer) == 'EDT'
	local, offset = tz.localize(summer)

Local clock readings are converted back using &.views.Zone.normalize. Readings
that were skipped by the change to daylight saving time raise
&.core.NonExistentLocalTime, and ambiguous readings select the numerically
lower offset.
"""
