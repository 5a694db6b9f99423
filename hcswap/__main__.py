from hcswap.cli.app import main

main()
