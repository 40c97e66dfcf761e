import os
import sys

# Let the tests run from a checkout without installing the package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
