from pqadmin.cli import console_main

console_main()
