"""
# Parse System V timezone recipes; the `TZ` environment variable syntax.

#!text
	recipe     := abbrev offset [ abbrev [offset] [ "," change "," change ] ]
	abbrev     := ALPHA{3,} | "<" (ALNUM | "+" | "-"){3,} ">"
	offset     := ["+"|"-"] h[h] [ ":" mm [ ":" ss ] ]
	change     := dayrule [ "/" h[h] [ ":" mm [ ":" ss ] ] ]
	dayrule    := "J" n | n | "M" m "." w "." d

# The sign of an offset in a recipe is the opposite of the offset's actual sign;
# `EST5` is five hours *behind* Universal Time. Offsets produced by this module
# are seconds east of Universal Time.

# [ Elements ]

# /tzenviron/
	# The environment variable consulted for a default recipe.
# /tzdefault/
	# The recipe used when &tzenviron is not set.
# /default_clock/
	# The clock time of a change when the recipe does not state one; 02:00:00.
# /offset_limit/
	# The greatest magnitude of an offset in seconds; 24:59:59.
"""
import string
import logging
import collections

from . import core
from . import rules

logger = logging.getLogger(__name__)

tzenviron = 'TZ'
tzdefault = 'UTC0'

default_clock = 2 * 3600
daylight_shift = 3600
offset_limit = (24 * 3600) + (59 * 60) + 59

digits = frozenset(string.digits)
alphabetic = frozenset(string.ascii_letters)
abbreviation_characters = frozenset(string.ascii_letters + string.digits + '+-')
offset_characters = frozenset(string.digits + ':')
rule_characters = frozenset(string.digits + 'JM.')

Daylight = collections.namedtuple('Daylight', ('abbreviation', 'offset', 'start', 'end'))

class Descriptor(collections.namedtuple('Descriptor', ('recipe', 'std_abbreviation', 'std_offset', 'dst'))):
	"""
	# The parsed form of a recipe.

	# [ Properties ]
	# /recipe/
		# The original string.
	# /std_abbreviation/
		# The abbreviation of standard time.
	# /std_offset/
		# The standard offset in seconds east of Universal Time.
	# /dst/
		# &Daylight when the recipe specifies daylight saving time, otherwise &None.
	"""
	__slots__ = ()

	@property
	def has_dst(self):
		return self.dst is not None

def _clock(fields, hour_limit):
	# Hours are one or two digits; minutes and seconds are exactly two.
	if not 1 <= len(fields) <= 3:
		return None

	h = fields[0]
	if not 1 <= len(h) <= 2 or not digits.issuperset(h) or int(h) > hour_limit:
		return None
	total = int(h) * 3600

	for field, scale in zip(fields[1:], (60, 1)):
		if len(field) != 2 or not digits.issuperset(field) or int(field) > 59:
			return None
		total += int(field) * scale

	return total

def parse_offset(token):
	"""
	# Convert a recipe offset, `[sign]hh[:mm[:ss]]`, to seconds east of Universal Time.

	# An absent sign or `+` produces a negative offset and `-` a positive one.
	"""
	sign = token[:1]
	if sign in ('+', '-'):
		body = token[1:]
	else:
		body = token

	magnitude = _clock(body.split(':'), 24)
	if magnitude is None or magnitude > offset_limit:
		raise core.MalformedOffset(token)

	if sign == '-':
		return magnitude
	return -magnitude

def parse_time(token):
	"""
	# Convert the time of day of a change rule, `hh[:mm[:ss]]`, to seconds.
	"""
	seconds = _clock(token.split(':'), 23)
	if seconds is None:
		raise core.MalformedOffset(token)
	return seconds

def parse_rule(token):
	"""
	# Convert a day rule token to a &rules.Julian, &rules.Plain, or &rules.MonthWeekDay.
	"""
	if token[:1] == 'J':
		n = _integer(token[1:])
		if n is not None and 1 <= n <= 365:
			return rules.Julian(n)
	elif token[:1] == 'M':
		fields = [_integer(x) for x in token[1:].split('.')]
		if len(fields) == 3 and None not in fields:
			m, w, d = fields
			if 1 <= m <= 12 and 1 <= w <= 5 and 0 <= d <= 6:
				return rules.MonthWeekDay(m, w, d)
	else:
		n = _integer(token)
		if n is not None and 0 <= n <= 365:
			return rules.Plain(n)

	raise core.MalformedRule(token)

def _integer(s):
	if not s or not digits.issuperset(s):
		return None
	return int(s)

class Parser(object):
	"""
	# Recursive descent parser for a single recipe.

	# Each production consumes from &position and returns its value or
	# raises &core.InvalidRecipe.
	"""

	def __init__(self, recipe):
		self.recipe = recipe
		self.position = 0

	def invalid(self, start=None):
		if start is None:
			start = self.position
		fragment = self.recipe[start:] or None
		return core.InvalidRecipe(self.recipe, fragment, start)

	def peek(self):
		return self.recipe[self.position:self.position+1]

	def at_end(self):
		return self.position >= len(self.recipe)

	def expect(self, character):
		if self.peek() != character:
			raise self.invalid()
		self.position += 1

	def span(self, characters):
		"""
		# Consume the longest run of &characters.
		"""
		start = self.position
		end = start
		s = self.recipe
		while end < len(s) and s[end] in characters:
			end += 1
		self.position = end
		return s[start:end]

	def abbreviation(self):
		start = self.position
		if self.peek() == '<':
			self.position += 1
			name = self.span(abbreviation_characters)
			self.expect('>')
		else:
			name = self.span(alphabetic)

		if len(name) < 3:
			raise self.invalid(start)
		return name

	def offset(self):
		start = self.position
		if self.peek() in ('+', '-'):
			self.position += 1
		self.span(offset_characters)

		try:
			return parse_offset(self.recipe[start:self.position])
		except core.MalformedOffset as err:
			raise self.invalid(start) from err

	def change(self, reference):
		"""
		# Parse a change rule whose clock time is read in the &reference offset.
		"""
		start = self.position
		token = self.span(rule_characters)
		try:
			rule = parse_rule(token)
		except core.MalformedRule as err:
			raise self.invalid(start) from err

		clock = default_clock
		if self.peek() == '/':
			self.position += 1
			start = self.position
			try:
				clock = parse_time(self.span(offset_characters))
			except core.MalformedOffset as err:
				raise self.invalid(start) from err

		return rules.Change(rule, clock - reference)

	def descriptor(self):
		"""
		# Parse the entire recipe.
		"""
		std_abbreviation = self.abbreviation()
		std_offset = self.offset()
		if self.at_end():
			return Descriptor(self.recipe, std_abbreviation, std_offset, None)

		dst_abbreviation = self.abbreviation()
		if self.peek() in ('+', '-') or self.peek() in digits:
			dst_offset = self.offset()
		else:
			dst_offset = std_offset + daylight_shift

		if self.at_end():
			logger.debug("recipe %r has no change rules; using %s,%s",
				self.recipe, rules.default_start, rules.default_end)
			start = rules.Change(rules.default_start, default_clock - std_offset)
			end = rules.Change(rules.default_end, default_clock - dst_offset)
		else:
			self.expect(',')
			start = self.change(std_offset)
			self.expect(',')
			end = self.change(dst_offset)
			if not self.at_end():
				raise self.invalid()

		dst = Daylight(dst_abbreviation, dst_offset, start, end)
		return Descriptor(self.recipe, std_abbreviation, std_offset, dst)

def parse(recipe):
	"""
	# Parse the &recipe string into a &Descriptor.

	# Raises &core.InvalidRecipe when any part of the string does not match the grammar.
	"""
	if not isinstance(recipe, str):
		raise core.InvalidRecipe(recipe)

	d = Parser(recipe).descriptor()
	logger.debug("parsed timezone recipe %r", recipe)
	return d
