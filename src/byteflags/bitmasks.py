from . import flags

# Keys byte
MASK_KEY_COPPER = 1 << flags.KEY_COPPER
MASK_KEY_JADE = 1 << flags.KEY_JADE
MASK_KEY_CRYSTAL = 1 << flags.KEY_CRYSTAL
MASK_KEY_LIMIT = 1 << flags.KEY_COUNT  # sentinel, not a key

# Document Permissions byte
MASK_PERM_LOCKED = 1 << flags.PERM_LOCKED
MASK_PERM_GROUP_READABLE = 1 << flags.PERM_GROUP_READABLE
MASK_PERM_GROUP_WRITABLE = 1 << flags.PERM_GROUP_WRITABLE
MASK_PERM_ALL_READABLE = 1 << flags.PERM_ALL_READABLE
MASK_PERM_ALL_WRITABLE = 1 << flags.PERM_ALL_WRITABLE
MASK_PERM_LIMIT = 1 << flags.PERM_COUNT  # sentinel, not a permission
