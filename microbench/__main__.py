from microbench.cli import main

main()
