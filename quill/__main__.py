from quill.repl import main

main()
