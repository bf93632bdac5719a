identity = 'http://fault.io/project/python/sysvzone'
name = 'sysvzone'
abstract = 'System V and POSIX timezone recipe parsing and offset selection.'
icon = '🕓'
study = 'horology'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
