from stayfit.cli import main

main()
