from modinstall.main import main

main()
