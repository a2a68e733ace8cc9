from quill.builtin.env_builtin import builtin
