# Descriptor files
DESCRIPTOR_FILE_NAME = "module.yaml"
DESCRIPTOR_TEMP_PREFIX = "module"
DESCRIPTOR_TEMP_SUFFIX = ".yaml"

# Versions
SNAPSHOT_SUFFIX = "-SNAPSHOT"

# Branches
DEFAULT_MAIN_RELEASE_BRANCH = "master"
DEFAULT_RELEASE_BRANCH_PREFIXES = ("support-", "support/")

# Profiles
RELEASE_PROFILE_NAME = "release"

# User properties
DISABLE_BRANCH_VERSIONING_PROPERTY_KEY = "disableBranchVersioning"
MAIN_RELEASE_BRANCH_PROPERTY_KEY = "mainReleaseBranch"
RELEASE_BRANCH_PREFIXES_PROPERTY_KEY = "releaseBranchPrefixes"
