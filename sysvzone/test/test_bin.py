import io
from ..bin import zone

def test_print_transitions(test):
	out = io.StringIO()
	status = zone.main(['zone', 'EST5EDT,M3.2.0,M11.1.0', '2020', '2021'], stdout=out)
	test/status == 0
	test/out.getvalue() == (
		"2020-03-08T07:00:00: EDT-14400\n"
		"2020-11-01T06:00:00: EST-18000\n"
		"2021-03-14T07:00:00: EDT-14400\n"
		"2021-11-07T06:00:00: EST-18000\n"
	)

def test_print_current_offset(test):
	out = io.StringIO()
	status = zone.main(['zone', 'EST5'], stdout=out, now=(lambda: 0))
	test/status == 0
	test/out.getvalue() == "1969-12-31T19:00:00 EST-18000\n"

def test_invalid_arguments(test):
	out = io.StringIO()
	err = io.StringIO()
	test/zone.main(['zone', 'EST'], stdout=out, stderr=err) == 1
	test/err.getvalue() << 'not a valid System V timezone recipe'
	test/out.getvalue() == ''

	err = io.StringIO()
	test/zone.main(['zone', 'EST5', 'next'], stdout=out, stderr=err) == 1

	err = io.StringIO()
	test/zone.main(['zone'], stdout=out, stderr=err) == 64
	test/err.getvalue() << 'usage'

if __name__ == '__main__':
	import sys; from . import library as libtest
	libtest.execute(sys.modules[__name__])
