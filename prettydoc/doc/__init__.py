"""Document algebra."""

from prettydoc.doc.annotations import alter_annotations, re_annotate, un_annotate
from prettydoc.doc.combinators import (
    BACKSLASH,
    COLON,
    COMMA,
    DOT,
    DQUOTE,
    EQUALS,
    HARDLINE,
    LANGLE,
    LBRACE,
    LBRACKET,
    LINE,
    LINE_,
    LPAREN,
    PIPE,
    RANGLE,
    RBRACE,
    RBRACKET,
    RPAREN,
    SEMI,
    SLASH,
    SOFTLINE,
    SOFTLINE_,
    SPACE,
    SQUOTE,
    align,
    angles,
    annotate,
    braces,
    brackets,
    cat,
    column,
    concat,
    concat_with,
    dquotes,
    empty,
    enclose,
    enclose_sep,
    fill,
    fill_break,
    fill_cat,
    fill_sep,
    flat_alt,
    hang,
    hardline,
    hcat,
    hsep,
    indent,
    line,
    line_,
    list_doc,
    nest,
    nesting,
    page_width,
    parens,
    plural,
    pretty,
    punctuate,
    sep,
    softline,
    softline_,
    space_join,
    spaces,
    squotes,
    surround,
    text,
    tupled,
    vcat,
    vsep,
    width,
)
from prettydoc.doc.flatten import (
    FlattenOutcome,
    FlattenResult,
    changes_upon_flattening,
    flatten,
    group,
)
from prettydoc.doc.model import (
    Annotated,
    Cat,
    Char,
    Column,
    Doc,
    DocNode,
    Empty,
    Fail,
    FlatAlt,
    Line,
    Nest,
    Nesting,
    Text,
    Union,
    WithPageWidth,
)

__all__ = [
    "BACKSLASH",
    "COLON",
    "COMMA",
    "DOT",
    "DQUOTE",
    "EQUALS",
    "HARDLINE",
    "LANGLE",
    "LBRACE",
    "LBRACKET",
    "LINE",
    "LINE_",
    "LPAREN",
    "PIPE",
    "RANGLE",
    "RBRACE",
    "RBRACKET",
    "RPAREN",
    "SEMI",
    "SLASH",
    "SOFTLINE",
    "SOFTLINE_",
    "SPACE",
    "SQUOTE",
    "Annotated",
    "Cat",
    "Char",
    "Column",
    "Doc",
    "DocNode",
    "Empty",
    "Fail",
    "FlatAlt",
    "FlattenOutcome",
    "FlattenResult",
    "Line",
    "Nest",
    "Nesting",
    "Text",
    "Union",
    "WithPageWidth",
    "align",
    "alter_annotations",
    "angles",
    "annotate",
    "braces",
    "brackets",
    "cat",
    "changes_upon_flattening",
    "column",
    "concat",
    "concat_with",
    "dquotes",
    "empty",
    "enclose",
    "enclose_sep",
    "fill",
    "fill_break",
    "fill_cat",
    "fill_sep",
    "flat_alt",
    "flatten",
    "group",
    "hang",
    "hardline",
    "hcat",
    "hsep",
    "indent",
    "line",
    "line_",
    "list_doc",
    "nest",
    "nesting",
    "page_width",
    "parens",
    "plural",
    "pretty",
    "punctuate",
    "re_annotate",
    "sep",
    "softline",
    "softline_",
    "space_join",
    "spaces",
    "squotes",
    "surround",
    "text",
    "tupled",
    "un_annotate",
    "vcat",
    "vsep",
    "width",
]
