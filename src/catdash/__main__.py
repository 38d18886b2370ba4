from catdash.main import main

main()
