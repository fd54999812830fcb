from ricecombine.cli import main

main()
