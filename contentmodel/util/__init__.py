# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

# Mixins
from .mixins import *

# Helpers
from .helpers import *
