from quill.reader.parser import lex, parse, TokenStream
