"""Pytest configuration and shared fixtures for the diffview test suite.

This module provides shared fixtures, test configuration, and sample
patches that are used across the entire test suite.
"""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

MODIFY_PATCH = """\
diff --git a/src/app.js b/src/app.js
index 4def792..b63576c 100644
--- a/src/app.js
+++ b/src/app.js
@@ -1,3 +1,3 @@
 function run() {
-  const value = calculateSomething();
+  const result = calculateSomething();
 }
@@ -10,3 +10,4 @@ function helper() {
   return 1;
+  // done
 }
 
"""

MULTI_FILE_PATCH = """\
diff --git a/src/bar.c b/src/bar.c
new file mode 100644
index 0000000..3b18e7a
--- /dev/null
+++ b/src/bar.c
@@ -0,0 +1,2 @@
+int bar(void);
+int baz(void);
diff --git a/src/old.c b/src/old.c
deleted file mode 100644
index 3b18e7a..0000000
--- a/src/old.c
+++ /dev/null
@@ -1 +0,0 @@
-int old(void);
diff --git a/src/alpha.c b/src/beta.c
similarity index 100%
rename from src/alpha.c
rename to src/beta.c
"""

WORD_DIFF = """\
diff --git a/before.tsx b/after.tsx
index fa4d9c4..8d980f1 100644
--- a/before.tsx
+++ b/after.tsx
@@ -1,5 +1,5 @@
 import React, { useRef } from "react";
 import { Check, [-Copy-]{+Copy, ChevronDown+} } from "lucide-react";
[-import { useTheme } from "next-themes";-]
{+import * as Collapsible from "@radix-ui/react-collapsible";+}
 const [-Inpt-]{+Input+} = () => {
 
"""


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")


@pytest.fixture
def modify_patch() -> str:
    """Git patch with two hunks of one modified file."""
    return MODIFY_PATCH


@pytest.fixture
def multi_file_patch() -> str:
    """Git patch adding, deleting and renaming files."""
    return MULTI_FILE_PATCH


@pytest.fixture
def word_diff_text() -> str:
    """Sample ``git diff --word-diff=plain`` output."""
    return WORD_DIFF


@pytest.fixture
def patch_file(tmp_path: Path) -> Path:
    """Write the modify patch to a temporary file."""
    path = tmp_path / "change.diff"
    path.write_text(MODIFY_PATCH, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch, tmp_path_factory):
    """Keep configuration discovery away from the developer's real files."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("DIFFVIEW_CONFIG", raising=False)
