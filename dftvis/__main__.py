# -*- coding: utf-8 -*-


import sys

from dftvis.apps.dft import main

sys.exit(main())
