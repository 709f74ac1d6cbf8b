FIELD_DELIMITER = '%'
SECTION_START = '{'
SECTION_END = '}'
SEPARATOR = '|'

ENUMERATION = 'enumeration'
ENUMERATION_JOIN = ', '
ENUMERATION_LAST = ' and '

ENV_VAR = 'PARSABLE_CONFIG'

KEY_PATTERN = 'patterns'
