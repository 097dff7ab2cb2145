from .statusline import main

main()
