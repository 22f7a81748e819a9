from scmrev.generator import main

main()
