#!/usr/bin/env python3

# Copyright (C) The cairo_hints developers
#
# This file is part of cairo_hints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cairo_hints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the cairo_hints package."

name = "cairo_hints"
__version__ = "2023.10.1"
__author__ = "The cairo_hints developers"
__author_email__ = "devs@cairo-hints.org"
__copyright__ = "Copyright (C) 2023 The cairo_hints developers"
__license__ = "MIT License"
