#!/usr/bin/env python3
"""
Main test runner for the varlang lexer tests.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_test():
    """Scan a small program end to end before running the suites."""

    print("varlang Lexer Test Suite")
    print("=" * 60)

    try:
        from varlang.lexer import Lexer, TokenType, LexerError
        print("✅ Lexer modules imported successfully")
    except ImportError as e:
        print(f"❌ Failed to import lexer modules: {e}")
        return False

    code = 'total : float = 1.5 * 2.0 + 3.25 % 2.0'

    print("Testing simple scan...")
    try:
        tokens = Lexer(code, "<smoke>").tokenize()
    except LexerError as e:
        print(f"  ❌ Lexing failed:\n{e}")
        return False

    illegal = [t for t in tokens if t.type == TokenType.ILLEGAL]
    if illegal:
        print(f"  ❌ Unexpected ILLEGAL tokens: {illegal}")
        return False

    print(f"  ✅ Generated {len(tokens)} tokens")
    print()
    return True


def run_all_tests():
    """Run all varlang tests."""
    if not run_smoke_test():
        return False

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print()
    print("=" * 60)
    if result.wasSuccessful():
        print(f"✅ All {result.testsRun} tests passed")
    else:
        print(f"❌ {len(result.failures)} failures, {len(result.errors)} errors "
              f"out of {result.testsRun} tests")
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
