from goat.main import main

main()
