from pingserver.server import main

main()
