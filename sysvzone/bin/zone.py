"""
# Print the transitions of a recipe zone.

# Usage: `python -m sysvzone.bin.zone RECIPE [YEAR ...]`

# When no years are given, the offset currently in effect is printed.
# The `TZ` environment variable is used when the recipe is `-`.
"""
import sys
import time
import logging

from .. import core
from .. import types
from .. import library

def print_zone_transitions(zone, years, write=sys.stdout.write):
	for year in years:
		for transition, offset in zone.transitions(year):
			write("%s: %s\n" %(transition.select('iso'), offset))

def print_current_offset(zone, now, write=sys.stdout.write):
	local, offset = zone.localize(now)
	write("%s\n" %(offset.iso(local),))

def main(argv=sys.argv, stdout=sys.stdout, stderr=sys.stderr, now=time.time):
	logging.basicConfig(level=logging.ERROR)

	args = argv[1:]
	if not args:
		stderr.write("usage: %s RECIPE [YEAR ...]\n" %(argv[0],))
		return 64

	recipe, *years = args
	try:
		zone = library.zone(None if recipe == '-' else recipe)
		years = [int(x) for x in years]
	except (core.InvalidRecipe, ValueError) as err:
		stderr.write(str(err) + '\n')
		return 1

	if years:
		print_zone_transitions(zone, years, write=stdout.write)
	else:
		print_current_offset(zone, types.from_unix_timestamp(now()), write=stdout.write)
	return 0

if __name__ == '__main__':
	sys.exit(main())
