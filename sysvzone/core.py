"""
# Exception hierarchy used by the recipe parser and zone views.
"""

class Error(Exception):
	"""
	# Common base for exceptions raised by &.
	"""

class InvalidRecipe(Error, ValueError):
	"""
	# Raised when a string is not a valid System V timezone recipe.

	# [ Properties ]
	# /recipe/
		# The complete string that was given to the parser.
	# /fragment/
		# The portion of the recipe that could not be recognized.
	# /position/
		# The index of &fragment in &recipe.
	"""

	def __init__(self, recipe, fragment=None, position=None):
		self.recipe = recipe
		self.fragment = fragment
		self.position = position
		super().__init__(recipe, fragment, position)

	def __str__(self):
		s = "not a valid System V timezone recipe: %r" %(self.recipe,)
		if self.fragment is not None:
			s += " (unrecognized %r at %d)" %(self.fragment, self.position)
		return s

class MalformedOffset(Error):
	'Raised when an offset or time of day token does not match `[sign]hh[:mm[:ss]]`.'

	def __init__(self, token):
		self.token = token
		super().__init__(token)

class MalformedRule(Error):
	'Raised when a day rule token is not a `Jn`, `n`, or `Mm.w.d` form.'

	def __init__(self, token):
		self.token = token
		super().__init__(token)

class NonExistentLocalTime(Error):
	"""
	# Raised when a local clock reading falls inside the gap created by
	# a change to daylight saving time.

	# [ Properties ]
	# /local/
		# The &.types.Instant holding the local reading.
	# /zone/
		# The name of the zone that the reading was interpreted in.
	"""

	def __init__(self, local, zone):
		self.local = local
		self.zone = zone
		super().__init__(local, zone)

	def __str__(self):
		return "non-existent local time %s in %r due to offset change" %(
			self.local.select('iso'), self.zone,
		)

class InternalError(Error):
	"""
	# Raised when the transition search did not converge within its limit.
	# Indicates a change rule that is not periodic over Gregorian years.
	"""
