# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rule tables shared by every apx-lint preset.

All tables are deep-frozen at import time. Use the helpers in
:mod:`apx_lint.config.builder` to derive new tables instead of mutating these.
"""

from __future__ import annotations

from typing import Final

from .types import FrozenRuleTable, freeze_rules

BASE_RULES: Final[FrozenRuleTable] = freeze_rules(
    {
        "@typescript-eslint/explicit-function-return-type": "off",
        "@typescript-eslint/no-explicit-any": "warn",
        "react/react-in-jsx-scope": "off",
        "react/prop-types": "off",
        "import/order": "off",
        "import/no-unresolved": "error",
        "import/extensions": [
            "error",
            "ignorePackages",
            {"js": "never", "jsx": "never", "ts": "never", "tsx": "never"},
        ],
        "no-plusplus": "off",
        "no-shadow": "off",
        "react/require-default-props": "off",
        "react/jsx-indent-props": ["error", 4],
        "react/function-component-definition": "off",
        "react/jsx-indent": ["error", 4],
        "react/jsx-closing-tag-location": "error",
        "react/jsx-filename-extension": [1, {"extensions": [".tsx", ".ts"]}],
        "import/no-cycle": "warn",
        "jsx-a11y/anchor-is-valid": "off",
        "no-console": "warn",
        "no-debugger": "warn",
        "no-undef": "error",
        "quotes": ["error", "single"],
        "no-duplicate-imports": "error",
        "comma-spacing": "error",
        "array-bracket-spacing": ["error", "never"],
        "semi": [2, "always"],
        "react/jsx-key": "off",
        "linebreak-style": 0,
        "object-curly-spacing": ["error", "always"],
        "arrow-body-style": 0,
        "indent": [2, 4, {"SwitchCase": 1}],
        "no-trailing-spaces": 0,
        "import/imports-first": "off",
        "no-unused-vars": "off",
        "@typescript-eslint/no-unused-vars": ["warn", {"argsIgnorePattern": "^_"}],
        "space-before-function-paren": 0,
        "func-names": 0,
        "new-cap": 0,
        "max-len": [2, 260],
        "no-param-reassign": [2, {"props": False}],
        "no-restricted-syntax": [1, "ForInStatement", "LabeledStatement", "WithStatement"],
        "class-methods-use-this": 0,
        "comma-dangle": ["error", "never"],
        "no-underscore-dangle": 0,
        "prefer-destructuring": 0,
        "import/no-named-as-default": 0,
        "@typescript-eslint/ban-types": "off",
        "import/prefer-default-export": 0,
        "@typescript-eslint/no-empty-object-type": "off",
        "object-curly-newline": [
            "error",
            {
                "ObjectExpression": {"multiline": True, "consistent": True},
                "ObjectPattern": {"multiline": True, "consistent": True},
            },
        ],
        "space-infix-ops": ["error", {"int32Hint": False}],
        "import/newline-after-import": ["error", {"count": 1}],
        "no-multi-spaces": ["error"],
        "key-spacing": ["error", {"beforeColon": False, "afterColon": True}],
        "prefer-const": ["error", {"destructuring": "all", "ignoreReadBeforeAssign": True}],
    }
)

# Applied on top of BASE_RULES when strict mode is requested.
STRICT_RULES: Final[FrozenRuleTable] = freeze_rules(
    {
        "@typescript-eslint/no-explicit-any": "error",
        "no-console": "error",
        "no-debugger": "error",
        "@typescript-eslint/no-unused-vars": ["error", {"argsIgnorePattern": "^_"}],
        "import/no-cycle": "error",
    }
)

RELAXED_RULES: Final[FrozenRuleTable] = freeze_rules(
    {
        "@typescript-eslint/no-explicit-any": "off",
        "no-console": "off",
        "import/no-cycle": "off",
    }
)

__all__ = ["BASE_RULES", "RELAXED_RULES", "STRICT_RULES"]
