#!/usr/bin/env python3
"""
Test runner for the glbaccessor package.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


def run_all_tests():
    """Run all unit tests."""
    loader = unittest.TestLoader()
    suite = loader.discover(str(Path(__file__).parent), pattern='test_*.py')

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    return result.wasSuccessful()


def run_specific_module(module_name):
    """Run tests for a specific module."""
    loader = unittest.TestLoader()

    try:
        module = __import__(f'tests.test_{module_name}', fromlist=[''])
    except ImportError:
        print(f"Error: Could not find test module 'test_{module_name}'")
        print("Available modules: common, gltype, zero, accessor, sparse, holder")
        return False

    suite = loader.loadTestsFromModule(module)
    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    return result.wasSuccessful()


if __name__ == '__main__':
    if len(sys.argv) > 1:
        success = run_specific_module(sys.argv[1])
    else:
        print("Running all tests...")
        print("=" * 60)
        success = run_all_tests()

    print("\n" + "=" * 60)
    print("All tests passed!" if success else "Some tests failed!")
    print("=" * 60)

    sys.exit(0 if success else 1)
