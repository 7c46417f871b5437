# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import logging


# Quieten rich's own logging when the rich handler is exercised
logging.getLogger("rich").setLevel(logging.WARNING)
