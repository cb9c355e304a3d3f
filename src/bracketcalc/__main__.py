from bracketcalc.cli import main

main()
