import datetime
from .. import types
from .. import gregorian

def test_instant_fields(test):
	i = types.Instant.of((2020,3,8), (2,30,0))
	test/i.day == gregorian.days_from_date((2020,3,8))
	test/i.second == 9000
	test/i.select('date') == (2020,3,8)
	test/i.select('timeofday') == (2,30,0)
	test/i.select('iso') == '2020-03-08T02:30:00'
	test/repr(i) == '<Instant(2020-03-08T02:30:00)>'
	test/types.Instant.of((5,1,1)).select('iso') == '0005-01-01T00:00:00'
	test/KeyError ^ (lambda: i.select('week'))

def test_instant_carry(test):
	i = types.Instant.of((2020,12,31), (23,0,0))
	test/i.elapse(7200) == types.Instant.of((2021,1,1), (1,0,0))
	test/i.rollback(-7200) == types.Instant.of((2021,1,1), (1,0,0))
	test/types.Instant.of((2021,1,1)).rollback(1) == types.Instant.of((2020,12,31), (23,59,59))
	test/types.Instant.normal(10, -86401) == types.Instant((8, 86399))
	test/types.Instant.of((2020,1,1), (24,0,0)) == types.Instant.of((2020,1,2))

def test_instant_clamp(test):
	test/types.Instant((5, 86400)).clamp() == types.Instant((5, 86399))
	i = types.Instant((5, 100))
	test/i.clamp() % i

def test_from_unix_timestamp(test):
	test/types.from_unix_timestamp(0) == types.Instant((types.unix_epoch, 0))
	test/types.from_unix_timestamp(0).select('iso') == '1970-01-01T00:00:00'
	test/types.from_unix_timestamp(1593561600) == types.Instant.of((2020,7,1))
	test/types.from_unix_timestamp(-1) == types.Instant.of((1969,12,31), (23,59,59))

def test_from_datetime(test):
	naive = datetime.datetime(2020, 7, 1, 12, 30, 15, 999999)
	test/types.from_datetime(naive) == types.Instant.of((2020,7,1), (12,30,15))

	eastern = datetime.timezone(datetime.timedelta(hours=-4))
	aware = datetime.datetime(2020, 7, 1, 0, 0, 0, tzinfo=eastern)
	test/types.from_datetime(aware) == types.Instant.of((2020,7,1), (4,0,0))
	test/types.local_from_datetime(aware) == types.Instant.of((2020,7,1))

	utc = datetime.datetime(2020, 1, 1, tzinfo=datetime.timezone.utc)
	test/types.from_datetime(utc) == types.Instant.of((2020,1,1))

if __name__ == '__main__':
	import sys; from . import library as libtest
	libtest.execute(sys.modules[__name__])
