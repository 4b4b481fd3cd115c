#!/usr/bin/env python3

from .common import *
from .pdffontcore14 import *
from .pdffontencoding import *
from .pdffontmetrics import *
