from quill.types.nil import Nil, NilType
from quill.types.symbol import Symbol
from quill.types.cell import Cell, from_list, to_list
from quill.types.quoted import Quoted
from quill.types.bind import Arity
from quill.types.environment import Scope
from quill.types.function import Function, NativeFunction, Closure
from quill.types.special_form import SpecialForm, NativeSpecialForm, Macro
