from eplmeta.main import main

main()
