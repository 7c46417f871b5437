# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

# Helpers
from .helpers import *

# Mixins
from .mixins import *
