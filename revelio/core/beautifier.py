"""
JavaScript normalization.
Reformats minified source into a consistent, indented layout so assignments
end up with regular spacing around ':' and '=' before pattern matching.
"""

from dataclasses import dataclass

import jsbeautifier


@dataclass(frozen=True)
class BeautifyOptions:
    indent_size: int = 2
    indent_char: str = " "
    max_preserve_newlines: int = 10
    preserve_newlines: bool = True
    keep_array_indentation: bool = False
    break_chained_methods: bool = False
    brace_style: str = "collapse"
    space_before_conditional: bool = True
    # string literals must reach the extractor exactly as written
    unescape_strings: bool = False
    jslint_happy: bool = False
    end_with_newline: bool = False
    wrap_line_length: int = 0
    comma_first: bool = False
    e4x: bool = False
    indent_empty_lines: bool = False

    def to_jsbeautifier(self):
        opts = jsbeautifier.default_options()
        opts.indent_size = self.indent_size
        opts.indent_char = self.indent_char
        opts.max_preserve_newlines = self.max_preserve_newlines
        opts.preserve_newlines = self.preserve_newlines
        opts.keep_array_indentation = self.keep_array_indentation
        opts.break_chained_methods = self.break_chained_methods
        opts.brace_style = self.brace_style
        opts.space_before_conditional = self.space_before_conditional
        opts.unescape_strings = self.unescape_strings
        opts.jslint_happy = self.jslint_happy
        opts.end_with_newline = self.end_with_newline
        opts.wrap_line_length = self.wrap_line_length
        opts.comma_first = self.comma_first
        opts.e4x = self.e4x
        opts.indent_empty_lines = self.indent_empty_lines
        return opts


DEFAULT_BEAUTIFY_OPTIONS = BeautifyOptions()


def beautify_source(content: str, options: BeautifyOptions = DEFAULT_BEAUTIFY_OPTIONS) -> str:
    if not content:
        return ""
    return jsbeautifier.beautify(content, options.to_jsbeautifier())
