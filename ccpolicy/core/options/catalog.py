from __future__ import annotations

from typing import Tuple


PEDANTIC_MARKER = "-pedantic"

# Organisation-wide diagnostics for every production and tool target.
# The toolchain already supplies -Wall, -Wunused-but-set-parameter and
# -Wno-free-heap-object, so they are not repeated here.
DEFAULT_OPTION_CATALOG: Tuple[str, ...] = (
    "-Werror",
    "-Wcast-align",
    "-Wcast-qual",
    "-Wchar-subscripts",
    "-Wcomment",
    "-Wconversion",
    "-Wdisabled-optimization",
    "-Wextra",
    "-Wfloat-equal",
    "-Wformat",
    "-Wformat-security",
    "-Wformat-y2k",
    "-Wimplicit-fallthrough",
    "-Wimport",
    "-Winit-self",
    "-Winvalid-pch",
    "-Wmissing-braces",
    "-Wmissing-field-initializers",
    "-Wparentheses",
    "-Wpointer-arith",
    "-Wredundant-decls",
    "-Wreturn-type",
    "-Wsequence-point",
    "-Wshadow",
    "-Wsign-compare",
    "-Wstack-protector",
    "-Wswitch",
    "-Wswitch-default",
    "-Wswitch-enum",
    "-Wtrigraphs",
    "-Wuninitialized",
    "-Wunknown-pragmas",
    "-Wunreachable-code",
    "-Wunused",
    "-Wunused-function",
    "-Wunused-label",
    "-Wunused-parameter",
    "-Wunused-value",
    "-Wunused-variable",
    "-Wvolatile-register-var",
    "-Wwrite-strings",
    "-Wno-error=deprecated-declarations",
    # TODO: re-add "-Wmissing-include-dirs" once generated include paths stop breaking the build
)
