import os
from .. import gregorian
from .. import library as libzone

us_eastern = 'EST5EDT,M3.2.0,M11.1.0'

def _restore_environ(key, value):
	if value is None:
		os.environ.pop(key, None)
	else:
		os.environ[key] = value

def test_zone_cache(test):
	z = libzone.zone(us_eastern)
	test/libzone.zone(us_eastern) % z
	test/libzone.zone(us_eastern, name='Eastern').name == 'Eastern'
	test/libzone.zone(us_eastern).name == us_eastern

def test_zone_environment(test):
	test.exits.callback(_restore_environ, 'TZ', os.environ.get('TZ'))

	os.environ['TZ'] = 'JST-9'
	test/libzone.zone().recipe == 'JST-9'

	del os.environ['TZ']
	test/libzone.zone().recipe == 'UTC0'

def test_parse(test):
	d = libzone.parse('EST5')
	test/d.std_offset == -18000
	test/libzone.InvalidRecipe ^ (lambda: libzone.parse('EST'))

def test_instant_operations(test):
	z = libzone.zone(us_eastern)
	summer = gregorian.days_from_date((2020,7,1))
	winter = gregorian.days_from_date((2020,1,1))

	test/libzone.name(z) == us_eastern
	test/libzone.has_dst_changes(z) == True
	test/libzone.has_dst_changes(libzone.zone('EST5')) == False

	test/libzone.is_dst_for_instant(z, summer, 0) == True
	test/libzone.offset_for_instant(z, summer, 0) == -14400
	test/libzone.abbreviation_for_instant(z, summer, 0) == 'EDT'

	test/libzone.is_dst_for_instant(z, winter, 0) == False
	test/libzone.offset_for_instant(z, winter, 0) == -18000
	test/libzone.abbreviation_for_instant(z, winter, 0) == 'EST'

def test_local_operations(test):
	z = libzone.zone(us_eastern)
	spring = gregorian.days_from_date((2020,3,8))
	autumn = gregorian.days_from_date((2020,11,1))

	test/libzone.offset_for_local(z, autumn, 5400) == -18000
	test/libzone.NonExistentLocalTime ^ (lambda: libzone.offset_for_local(z, spring, 9000))

def test_datetime_instants(test):
	import datetime
	z = libzone.zone(us_eastern)
	dt = datetime.datetime(2020, 7, 1, tzinfo=datetime.timezone.utc)
	test/z.abbreviation(libzone.from_datetime(dt)) == 'EDT'
	test/z.abbreviation(libzone.from_unix_timestamp(1577836800)) == 'EST'

if __name__ == '__main__':
	import sys; from . import library as libtest
	libtest.execute(sys.modules[__name__])
