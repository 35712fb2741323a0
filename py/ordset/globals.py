# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

# Global variables

import os

# Report warnings that only matter to careful callers, such as a
# transform passed to a constructor that has nothing to transform
verbose = False

# all warnings are disabled
ignore_all_warnings = False

# Emit debug traces on stderr from the partitioning code
debug = bool(os.getenv('ORDSET_DEBUG'))
