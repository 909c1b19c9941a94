"""
ECMA-BASIC - base package
Tokens, errors and control flow values

(c) 2020--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""
